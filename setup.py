from setuptools import setup, find_packages

setup(
    name="sweepfield",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["compute_distance_field"],
    install_requires=[
        "torch>=1.9.0",
        "matplotlib",
        "numpy",
        "pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="Distance fields of binary images using the fast sweeping method",
    keywords="distance transform, eikonal, fast sweeping, skeletonization",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
