"""
Audio Noise Gen Setup Script

Streaming white, pink and brown noise WAV generator.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README file
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    with open(requirements_path, "r", encoding="utf-8") as f:
        requirements = [
            line.strip() 
            for line in f 
            if line.strip() and not line.startswith("#") and not line.startswith("-")
        ]

setup(
    name="audio-noise-gen",
    version="1.0.0",
    author="Audio Noise Gen Team",
    description="Generate white, pink and brown noise WAV files of any length in constant memory",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "Environment :: Console"
    ],
    keywords=[
        "audio", "noise", "white-noise", "pink-noise", "brown-noise",
        "wav", "pcm", "audio-generation"
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=1.0.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "audio-noise-gen=audio_noise_gen.cli:main",
        ],
    },
    zip_safe=False,
    platforms=["any"],
    license="Apache-2.0",
    test_suite="tests"
)
