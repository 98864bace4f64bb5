# Copyright (c) "Neo4j"
# Neo4j Sweden AB [https://neo4j.com]
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import pathlib
import sys

from setuptools import (
    find_packages,
    setup,
)


sys.path.insert(0, str(pathlib.Path(__file__).parent / "src"))

from nbtreader._meta import (
    package,
    version,
)


test_requires = [
    "pytest>=7.0",
    "pytest-mock>=3.10",
    "numpy>=1.21",
]


setup(
    name=package,
    version=version,
    description="Stack-safe decoder for named binary tag (NBT) documents",
    license="Apache License, Version 2.0",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "numpy": ["numpy>=1.21"],
        "test": test_requires,
    },
)
