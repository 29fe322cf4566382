# setup.py
from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize
import os

# Full path to the pyx
pyx_path = os.path.join("stackvm", "engine", "vm_cy.pyx")

setup(
    name="stackvm",
    version="0.1.0",
    description="A small stack-based bytecode virtual machine",
    packages=find_packages(include=["stackvm", "stackvm.*"]),
    package_data={"stackvm.engine": ["vm_cy.pyx"]},
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    ext_modules=cythonize(
        Extension(
            name="stackvm.engine.vm_cy",  # module path for import
            sources=[pyx_path],
            optional=True,  # pure-Python loop is still usable without a C toolchain
        ),
        compiler_directives={'language_level': "3", "boundscheck": False, "wraparound": False}
    ),
    zip_safe=False,
)
