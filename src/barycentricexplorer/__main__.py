"""
Run with: python -m barycentricexplorer
"""
from barycentricexplorer.main import main

main()
