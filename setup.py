from setuptools import find_packages, setup

setup(
  name="abbrase",
  version="0.1.0",
  description="Abbreviated passphrase generator with memorable mnemonics",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: POSIX",
  ],
  install_requires=[
    "colorama>=0.4",
    "xdg>=5",
    "zxcvbn-covert>=5.0",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(console_scripts=["abbrase = abbrase.__main__:main"],),
)
