from setuptools import setup, find_packages

setup(
    name="sudoku-play",
    version="1.0.0",
    description="Sudoku Puzzle Engine: unique-solution generator, solver and play sessions",
    packages=find_packages(include=["sudoku_play", "sudoku_play.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-play=sudoku_play.cli:main",
        ],
    },
)
