from setuptools import find_packages, setup

setup(
    name="taskpad",
    version="1.0.0",
    description="A single-screen terminal task manager built on Textual.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"taskpad.ui": ["*.tcss"]},
    include_package_data=True,
    install_requires=[
        "textual>=0.86",
        "rich",
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "taskpad=taskpad.__main__:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
