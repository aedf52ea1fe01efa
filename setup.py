import os
import re

from setuptools import setup


def get_version():
    module_init = 'colord/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='python-colord',
      version=get_version(),
      description='Client library for the colord color management daemon',
      author='python-colord Developers',
      license='LGPL',
      platforms='Linux',
      packages=['colord'],
      python_requires='>=3.7',
      install_requires=['colorlog', 'pydbus', 'PyGObject', 'traitlets', 'wrapt'],
      extras_require={
          'test': ['pytest']
      },
      keywords='colord color management icc profile dbus',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Multimedia :: Graphics'
      ])
