from setuptools import setup, find_packages
from vncpasswd import version as vncpasswd_version

setup(
    name='vncpasswd',
    version=vncpasswd_version,
    packages=find_packages(exclude=['bin', 'docs', '*.pyc']),
    scripts=['bin/vncpasswd'],
    license='GPL 3',
    include_package_data=True,
    long_description=open('README.rst').read(),
    description='Obfuscate and recover VNC server passwords.',
    install_requires=open('requirements.txt').read(),
    extras_require={
        'test': ['pytest'],
    },
    package_data={
        "vncpasswd": ["vncpasswd.yml"],
    },
)
