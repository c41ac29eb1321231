from setuptools import setup, find_packages

setup(
    name="icsgen",
    version="0.1.0",
    description="Generate single-event iCalendar (.ics) documents",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"icsgen": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        'icalendar>=5.0.0',
        'python-dateutil>=2.8.1',
        'PyYAML>=6.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.0.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'coverage>=7.0.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'icsgen=icsgen.cli:main'
        ]
    }
)
