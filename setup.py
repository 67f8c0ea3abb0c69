from setuptools import setup

setup(
    name='exactpredicates',
    version='0.1',
    packages=['exactpredicates'],
    install_requires=['numpy'],
    extras_require={'test':['pytest','shapely']},
    python_requires='>=3.7',
    license='MIT',
    description="Exact orientation and incircle predicates for points in the plane",
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
