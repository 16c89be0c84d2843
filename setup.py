from setuptools import setup, find_packages

setup(name = "meshdraw",
      version = "0.1.0",
      description = "Wireframe and texture coordinate debug drawing of triangle meshes",
      keywords = "mesh wireframe projection uv",
      license = "GPL",
      packages = find_packages(include=["meshdraw", "meshdraw.*"]),
      python_requires = ">=3.6",
      install_requires = [
        "numpy",
        "pillow",
        ],
      extras_require = {
        "test": [
          "pytest",
          "hypothesis",
          ],
        },

      zip_safe = False,
      )
