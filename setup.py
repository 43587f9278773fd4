#    Copyright 2025 FAO
# 
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
# 
#        http://www.apache.org/licenses/LICENSE-2.0
# 
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the a specific language governing permissions and
#    limitations under the License.
# 
#    Author: Carlo Cancellieri (ccancellieri@gmail.com)
#    Company: FAO, Viale delle Terme di Caracalla, 00100 Rome, Italy
#    Contact: copyright@fao.org - http://fao.org/contact-us/terms/en/

import os
import sys
from setuptools import setup, find_packages
import logging
from typing import Set

# --- Configuration ---
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s', stream=sys.stdout)

# The project root is the directory containing this setup.py file.
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# --- Parse Requirements ---
def parse_requirements(file_path: str, processed_files: Set[str] = None) -> Set[str]:
    if processed_files is None:
        processed_files = set()

    if not os.path.isabs(file_path):
        file_path = os.path.join(PROJECT_ROOT, file_path)

    if file_path in processed_files:
        return set()
    processed_files.add(file_path)

    if not os.path.exists(file_path):
        logging.warning(f"Requirements file not found: {file_path}")
        return set()

    packages = set()
    with open(file_path, 'r', encoding='utf-8') as f:
        for line in f:
            processed_line = line.strip()
            if not processed_line or processed_line.startswith('#'):
                continue
            if processed_line.startswith('-r'):
                _, next_file = processed_line.split(maxsplit=1)
                next_file_path = os.path.join(os.path.dirname(file_path), next_file)
                packages.update(parse_requirements(next_file_path, processed_files))
            else:
                packages.add(processed_line)
    return packages


install_requires = sorted(parse_requirements('requirements.txt'))
extras_require = {
    'test': sorted(parse_requirements('requirements-test.txt') - set(install_requires)),
}
logging.info(f"Install requirements: {install_requires}")
logging.info(f"Extras: {extras_require}")

setup(
    name="translatable",
    version="0.1.0",
    description="Locale-aware attribute storage: one JSON column mapping locale codes to text.",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
)
