# Copyright 2003-2009, BlueDynamics Alliance - http://bluedynamics.com
# GNU General Public License Version 2 or later

from setuptools import setup, find_packages
import os

def read(*rnames):
    with open(os.path.join(os.path.dirname(__file__), *rnames)) as f:
        return f.read()

version = '1.0'
shortdesc = "Ordered mapping with positional access"

long_description = (
    read('README.txt')
    + '\n' +
    read('CHANGES.txt')
    + '\n' +
    'Download\n'
    '========\n'
    )

setup(name='orderedmap',
      version=version,
      description=shortdesc,
      long_description=long_description,
      classifiers=[
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'License :: OSI Approved :: GNU General Public License (GPL)',
            'Operating System :: OS Independent',
      ],
      keywords='ordered, dict, mapping, odict',
      author='Philipp Auersperg, Jens Klein, Robert Niederreiter, et al',
      author_email='dev@bluedynamics.com',
      license='GNU General Public Licence',
      packages=find_packages('src'),
      package_dir = {'': 'src'},
      package_data={'orderedmap': ['*.zcml', '*.txt']},
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.7',
      install_requires=[
          'setuptools',
          'zope.interface',
      ],
      extras_require = dict(
          test=[
            'zope.component[zcml]',
            'zope.configuration',
            'zope.security',
            'zope.testing',
            'zope.testrunner',
            'pytest',
          ]
      ),
      entry_points="""
      # -*- Entry points: -*-
      """,
      )
