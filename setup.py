""" Setup for arpabet
"""

from os import path

from setuptools import find_packages, setup

# Ugly hack to read the current version number without importing arpabet:
with open("arpabet/_version.py", "r", encoding="utf8") as version_file:
    namespace: dict = {}
    exec(version_file.read(), namespace)
    VERSION = namespace["VERSION"]
    # [N!]N(.N)*[{a|b|rc}N][.postN][.devN]

this_directory = path.abspath(path.dirname(__file__))

with open(path.join(this_directory, "README.md"), encoding="utf8") as f:
    long_description = f.read()

with open(path.join(this_directory, "requirements.txt"), encoding="utf8") as f:
    REQS = [req for req in f.read().splitlines() if req and not req.startswith("#")]

setup(
    name="arpabet",
    python_requires=">=3.10",
    version=VERSION,
    license="MIT",
    description="ARPABET phonemes and the CMU Pronouncing Dictionary",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platform=["any"],
    packages=find_packages(),
    package_data={"arpabet": ["data/*.json", "tests/data/*", "tests/data/configs/*"]},
    include_package_data=True,
    install_requires=REQS,
    entry_points={"console_scripts": ["arpabet = arpabet.cli:app"]},
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
