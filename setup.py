"""
ElevenLabs Python Client - Setup

A Python client for the ElevenLabs text to speech and voice AI API.
"""

from setuptools import setup, find_packages
import os
import re

# Read the README
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# Read version
with open(os.path.join(here, "elevenlabs_client", "_version.py"), encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)

setup(
    name="elevenlabs-client",
    version=version,
    description="Python client for the ElevenLabs API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["elevenlabs_client", "elevenlabs_client.*"]),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.25.0",
        "websockets>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-cov>=4.0",
            "mypy>=1.0",
            "black>=23.0",
            "ruff>=0.0.270",
            "respx>=0.20",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio :: Speech",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    keywords=[
        "elevenlabs",
        "tts",
        "text-to-speech",
        "speech",
        "voice",
        "dubbing",
        "stt",
        "transcription",
        "agents",
    ],
    package_data={
        "elevenlabs_client": ["py.typed"],
    },
    zip_safe=False,
)
