"""
Setup script for C1 Assist.

Install:            pip install -e .[test]
macOS .app bundle:  python3 setup.py py2app
"""
import sys
from pathlib import Path

from setuptools import setup, find_packages

APP = ['run_gui.py']

# The session template is not redistributed with the sources; the bundle
# ships it when it has been placed in c1_assist/assets/.
TEMPLATE = Path('c1_assist/assets/main.db')
DATA_FILES = [('', [str(TEMPLATE)])] if TEMPLATE.exists() else []

OPTIONS = {
    'argv_emulation': False,
    'packages': ['c1_assist'],
    'includes': [
        'PySide6.QtCore',
        'PySide6.QtWidgets',
        'PySide6.QtGui',
    ],
    'excludes': ['tkinter', 'test', 'distutils'],
    'plist': {
        'CFBundleName': 'C1 Assist',
        'CFBundleDisplayName': 'C1 Assist',
        'CFBundleIdentifier': 'com.c1assist.projectgenerator',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'NSHighResolutionCapable': True,
        'LSMinimumSystemVersion': '11.0',
    },
}

extra = {}
if 'py2app' in sys.argv:
    extra = dict(
        app=APP,
        data_files=DATA_FILES,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='c1-assist',
    version='1.0.0',
    description='Creates Capture One session projects with pre-registered capture folders',
    packages=find_packages(include=['c1_assist', 'c1_assist.*']),
    package_data={'c1_assist': ['assets/*.db', 'assets/README.md']},
    python_requires='>=3.10',
    install_requires=['PySide6'],
    extras_require={'test': ['pytest']},
    entry_points={'gui_scripts': ['c1-assist = c1_assist.app:main']},
    **extra,
)
