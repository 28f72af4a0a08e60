# Copyright 2019 TerraPower, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Setup.py script for plaintable."""
from setuptools import setup, find_packages
import os
import pathlib

# grab __version__ from meta.py, without calling __init__.py
this_file = pathlib.Path(__file__).parent.absolute()
exec(open(os.path.join(this_file, "plaintable", "meta.py"), "r").read())

with open(os.path.join(this_file, "README.rst")) as f:
    README = f.read()


setup(
    name="plaintable",
    version=__version__,  # noqa: undefined-name
    description="Aligned, fixed-width plain text tables",
    author="TerraPower, LLC",
    license="Apache 2.0",
    long_description=README,
    python_requires=">=3.7",
    packages=find_packages(),
    install_requires=[
        "ruamel.yaml",
        "voluptuous",
    ],
    extras_require={
        "dev": [
            "black==22.6",
            "pytest",
            "pytest-cov",
            "pytest-xdist",
            "ruff==0.0.272",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Text Processing",
        "License :: OSI Approved :: Apache Software License",
    ],
)
