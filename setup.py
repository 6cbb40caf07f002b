import os

from setuptools import find_namespace_packages, setup

with open(os.path.join(os.path.dirname(__file__), "regexp_udf", "VERSION")) as f:
    version = f.read().strip()

packages = find_namespace_packages(include=["regexp_udf", "regexp_udf.*"])

install_requires = [
    "packaging",
    "polars>=1.5",
    "pyarrow>=14",
    "structlog",
    "typing_extensions",
]

extras_require = {
    "test": [
        "pytest",
    ],
}

setup(name='regexp-udf',
      description="Spark compatible regexp_extract for columnar engines",
      version=version,
      classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
      ],
      author="NVIDIA Corporation",
      packages=packages,
      package_data={
        'regexp_udf': ['VERSION'],
      },
      python_requires=">=3.10",
      install_requires=install_requires,
      extras_require=extras_require,
      license="Apache",
      zip_safe=False
      )
