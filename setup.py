from setuptools import setup

setup(name='bswp',
        version='0.3.0',
        description='byte swapping using masked patterns at periodic stream positions',
        url='',
        author='',
        author_email='',
        license='MIT',
        packages=['bswp', 'bswp.patterns', 'bswp.localities'],
        python_requires='>=3.8',
        install_requires=['colorama', 'pyyaml', 'tqdm'],
        extras_require={
            'test': ['pytest', 'pytest-cov', 'pytest-console-scripts'],
            'docs': ['sphinx', 'sphinx-autoapi'],
        },
        entry_points={
            'console_scripts': [
                'bswp=bswp.cli:main',
            ],
        },
        include_package_data=True,
        zip_safe=False)
