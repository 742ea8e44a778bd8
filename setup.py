#!/usr/bin/env python

import os
from fnmatch import fnmatch

from setuptools import setup


def ispackage(x):
    return os.path.isdir(x) and os.path.exists(os.path.join(x, '__init__.py'))


def find_packages(where='ndbuf', exclude=('*__pycache__*',),
                  predicate=ispackage):
    func = lambda x: predicate(x) and not any(fnmatch(x, exc)
                                              for exc in exclude)
    return [x[0].replace(os.sep, '.')
            for x in os.walk(where) if func(x[0])]


packages = find_packages()


def read(filename):
    with open(filename, 'r') as f:
        return f.read()


def read_reqs(filename):
    return read(filename).strip().splitlines()


def install_requires():
    return read_reqs('etc/requirements.txt')


def extras_require():
    return {req: read_reqs('etc/requirements_%s.txt' % req)
            for req in {'test'}}


if __name__ == '__main__':
    setup(name='ndbuf',
          version='0.1.0',
          description='N-dimensional strided arrays over flat numeric buffers',
          long_description=read('README.rst'),
          install_requires=install_requires(),
          extras_require=extras_require(),
          python_requires='>=3.8',
          license='BSD',
          classifiers=['Development Status :: 2 - Pre-Alpha',
                       'Intended Audience :: Developers',
                       'Intended Audience :: Science/Research',
                       'License :: OSI Approved :: BSD License',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python :: 3',
                       'Topic :: Scientific/Engineering'],
          packages=packages)
