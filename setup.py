import setuptools

setuptools.setup(
    name = 'curvelab',
    version = '1.0',
    description = 'editable spline curves from draggable control points',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
)
