# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='powbench',
    version='0.1.0',
    description='Loop vs. sequential vs. parallel pipeline micro-benchmark',
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Only the library; `benchmarks/` holds runnable scripts.
    packages=find_packages(include=['powbench', 'powbench.*']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['powbench=powbench.tools.bench_cli:main'],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
