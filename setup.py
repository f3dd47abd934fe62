"""Setup script for the uasset Python package."""

from setuptools import setup, find_packages

package_name = 'uasset'


setup(
    name=package_name,
    version='0.3.0',
    packages=find_packages(exclude=['test']),
    package_data={
        'uasset.config': ['*.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'setuptools',
        'pyyaml>=6.0',
        'numpy>=1.21.0',
        'psutil>=5.9.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'isort>=5.12.0',
            'mypy>=1.0.0',
            'flake8>=6.0.0',
        ],
    },
    zip_safe=False,
    maintainer='uasset Team',
    maintainer_email='maintainer@example.com',
    description='uasset - Unreal Engine package summary decoder',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'uasset = uasset.cli:main',
        ],
    },
    python_requires='>=3.10',
)
