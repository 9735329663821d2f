"""Configuration for pytest."""

import os
import sys

# Add the src directory to the Python path so the package imports without installation
test_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(test_dir)
src_dir = os.path.join(project_root, "src")

if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

if test_dir not in sys.path:
    sys.path.insert(0, test_dir)
