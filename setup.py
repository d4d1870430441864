from setuptools import setup, find_packages

setup(
    name="cleanup-html",
    version="0.1.0",
    author="Organized Crime and Corruption Reporting Project",
    packages=find_packages(exclude=["tests"]),
    package_dir={"cleanup_html": "cleanup_html"},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        # When you use this in production, pin the dependencies!
        "servicelayer",
        "beautifulsoup4>=4.13.4",
        "lxml>=6.0.0",
        "click>=8.2.1",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    license="MIT",
    zip_safe=False,
    test_suite="tests",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["cleanup-html = cleanup_html.cli:cli"],
    },
)
