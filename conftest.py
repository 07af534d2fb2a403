import os
import sys

# Ensure repo-local imports (heuribot, interface, web) resolve without installing.
repo_dir = os.path.abspath(os.path.dirname(__file__))
if repo_dir not in sys.path:
    sys.path.insert(0, repo_dir)
