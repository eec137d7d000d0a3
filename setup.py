from setuptools import setup, find_packages

setup(
    name='tablang',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow'],  # Numeric views of selections (sum, avg, min, max)
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tablang=tab_lang.cli:main'  # Entry point to main function
        ]
    },
    author='tablang developers',
    description='A command-line editor for delimited text tables driven by a small command language',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    python_requires='>=3.8',
)
