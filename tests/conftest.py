# tests/conftest.py
import matplotlib

# No display in test runs
matplotlib.use("Agg")
