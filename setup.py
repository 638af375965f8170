from setuptools import find_packages, setup

setup(
  name="edsigner",
  description="Ed25519 signatures and X25519 key conversion in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  version="1.3.0",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "colorama>=0.4",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "pynacl>=1.4", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(
    console_scripts=["edsigner = edsigner.cli.__main__:main"],
  ),
)
