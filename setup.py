import os
from subprocess import check_output

from setuptools import setup, find_packages

PKG_DIR = os.path.dirname(os.path.realpath(__file__))

def git_cmd(p, args):
    g = ['git', '-C', p]
    return check_output(g + args).decode('UTF-8').strip().lstrip('v')

def git_version(p):
    ver_all = git_cmd(p, ['describe', '--tags', '--dirty=.dirty'])
    ver_tag = git_cmd(p, ['describe', '--tags', '--abbrev=0'])
    return ver_tag +  ver_all[len(ver_tag):].replace('-', '.dev', 1).replace('-', '+', 1)

with open(os.path.join(PKG_DIR, 'README.md')) as f:
    long_description = f.read()

with open(os.path.join(PKG_DIR, 'requirements.txt')) as f:
    requirements = f.read().splitlines()

if os.path.exists(os.path.join(PKG_DIR, 'version.txt')):
    with open(os.path.join(PKG_DIR, 'version.txt')) as f:
        version = f.read().strip()
else:
    version = git_version(PKG_DIR)

setup(
    name='bcapp-info',
    version=version,
    install_requires=requirements,
    extras_require={
        'test': ['pytest', 'pycryptodomex'],
    },
    packages=find_packages(exclude=('build', 'dist', 'tests',)),
    include_package_data=True,
    license='MIT',
    description='Reads app information from Business Central app packages',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Utilities',
    ],
)
