from setuptools import setup, find_packages

setup(
    name='iso8601date',
    version='0.1.0',
    project_urls={
        'ISO 8601': 'https://www.iso.org/iso-8601-date-and-time-format.html',
    },
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'python-dateutil',
            'hypothesis',
        ],
    },
    license='MIT',
    description='A strict parser and validator for ISO 8601 calendar, ordinal, week and quarter dates.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
