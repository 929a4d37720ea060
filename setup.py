from setuptools import setup, find_packages

setup(
    name='PkmStruct',
    version='0.1',
    zip_safe=False,
    packages=find_packages(),
    install_requires=[
        'construct>=2.10,<3',
        'attrs>=17.4',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
    ]
)
