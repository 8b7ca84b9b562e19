from setuptools import setup, find_packages

setup(
    name="hanoi_viz",
    version="0.1.0",
    description="Towers of Hanoi terminal visualizer",
    packages=find_packages(where="lib"),
    package_dir={"": "lib"},
    package_data={"hanoi_viz": ["data/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hanoi-viz=hanoi_viz.cli:main",
        ],
    },
)
