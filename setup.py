import setuptools

DISTNAME = "sparseenet"
DESCRIPTION = (
    "Weighted elastic-net linear regression by coordinate descent, "
    "with active-set sweeps, in Python."
)
LONG_DESCRIPTION = open("README.md").read()
MAINTAINER = "Kyohei Atarashi"
MAINTAINER_EMAIL = "atarashi@i.kyoto-u.ac.jp"
LICENSE = "MIT"
VERSION = "0.1.dev0"
INSTALL_REQUIRES = [
    "numpy",
    "scipy",
    "scikit-learn",
    "numba",
]
EXTRAS_REQUIRE = {"tests": ["pytest"]}


if __name__ == "__main__":
    setuptools.setup(
        name=DISTNAME,
        maintainer=MAINTAINER,
        include_package_data=True,
        maintainer_email=MAINTAINER_EMAIL,
        description=DESCRIPTION,
        license=LICENSE,
        version=VERSION,
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        packages=setuptools.find_packages(include=["sparseenet", "sparseenet.*"]),
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        zip_safe=False,
        classifiers=[
            "Intended Audience :: Science/Research",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Topic :: Software Development",
            "Topic :: Scientific/Engineering",
            "Operating System :: POSIX",
            "Operating System :: Unix",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
