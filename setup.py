import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="afpvalidator",
    version="0.0.1",
    description="Structure validator for AFP/MO:DCA print streams",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/afpvalidate.py'],
    install_requires=[
        'bitstring',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
