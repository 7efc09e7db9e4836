from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'README.md')) as f:
    ooenv_long_description = f.read()

setup(
    name='ooenv',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    version='1.0.0',
    description='Locate OpenOffice and OpenOffice SDK installations for build tools',
    long_description=ooenv_long_description,
    long_description_content_type='text/markdown',
    license='LGPL-2.1',
    install_requires=['jpype1'],
    extras_require={'dev': ['pytest']},
    entry_points={'console_scripts': ['ooenv=ooenv._cli:run']},
)
