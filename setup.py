from setuptools import setup, find_packages
import os

current_path = os.path.dirname(os.path.abspath(__file__))
target_path = os.path.join(current_path, "src")


if __name__ == "__main__":
    setup(
        name='dwelling-model',
        version='0.1.0',
        description='Monthly dwelling energy assessment',
        package_dir={'': 'src'},
        packages=find_packages(where=target_path),
        py_modules=['assess'],
        package_data={'dwelling_model': [os.path.join('data', '*.csv')]},
        python_requires='>=3.8',
        install_requires=[
            'numpy',
            'loguru',
        ],
        extras_require={
            'test': ['pytest'],
        },
    )
