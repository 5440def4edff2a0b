"""Everyday development kits: strings, bytes, containers, property files, hashing, AES, encodings and system helpers."""

__version__ = "0.1.0"