# -*- coding: utf-8 -*-

from setuptools import setup


setup(
    name='strcomb',
    version='1.0.0',
    packages=['strcomb', 'strcomb.contrib'],
    python_requires='>=3.9',
    author='Andrey Vlasovskikh',
    author_email='andrey.vlasovskikh@gmail.com',
    description='Backtracking parsing combinators for strings with fatal '
        'commit points',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ],
)
