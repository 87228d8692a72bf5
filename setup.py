#
# Copyright (c) 2018-2025, NVIDIA CORPORATION.
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
#

import glob
import shutil
import sys
from pathlib import Path

from setuptools import find_packages, setup


##############################################################################
# - Helper functions
def get_cli_option(name):
    if name in sys.argv:
        print("-- Detected " + str(name) + " build option.")
        return True

    else:
        return False


def clean_folder(path):
    """
    Function to clean all Python artifacts and cache folders. It cleans the
    folder as well as its direct children recursively.

    Parameters
    ----------
    path : String
        Path to the folder to be cleaned.
    """
    shutil.rmtree(path + "/__pycache__", ignore_errors=True)

    folders = glob.glob(path + "/*/")
    for folder in folders:
        shutil.rmtree(folder + "/__pycache__", ignore_errors=True)

        clean_folder(folder)


##############################################################################
# - Print of build options used by setup.py  --------------------------------

clean_artifacts = get_cli_option("clean")


##############################################################################
# - Clean target -------------------------------------------------------------

if clean_artifacts:
    print("-- Cleaning all Python build artifacts...")

    try:
        setup_file_path = str(Path(__file__).parent.absolute())
        shutil.rmtree(setup_file_path + "/.pytest_cache", ignore_errors=True)
        shutil.rmtree(
            setup_file_path + "/.hypothesis", ignore_errors=True
        )
        shutil.rmtree(
            setup_file_path + "/hostml.egg-info", ignore_errors=True
        )
        shutil.rmtree(setup_file_path + "/__pycache__", ignore_errors=True)

        clean_folder(setup_file_path + "/hostml")
        shutil.rmtree(setup_file_path + "/build", ignore_errors=True)
        shutil.rmtree(setup_file_path + "/dist", ignore_errors=True)

    except IOError:
        pass

    sys.argv.remove("clean")

    if "--all" in sys.argv:
        sys.argv.remove("--all")

    if len(sys.argv) == 1:
        sys.exit(0)


##############################################################################
# - Python package generation ------------------------------------------------

install_requires = [
    "joblib",
    "numpy",
    "scikit-learn>=1.3",
    "scipy",
]

extras_require = {
    "test": [
        "hypothesis",
        "pytest",
    ],
}

setup(
    name="hostml",
    version="0.1.0",
    author="NVIDIA Corporation",
    license="Apache-2.0",
    description="Host memory estimators with a One-vs-Rest multiclass core",
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
    packages=find_packages(include=["hostml", "hostml.*"]),
    zip_safe=False,
)
