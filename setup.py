from setuptools import find_packages, setup

setup(
    name="hookbus",
    version="0.1.0",
    description="Priority-ordered action and filter hooks with value threading",
    packages=find_packages(include=["hookbus", "hookbus.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["pydantic>=2", "PyYAML"],
    extras_require={"test": ["pytest"]},
)
