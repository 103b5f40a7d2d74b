# simulations/__init__.py
"""
Monte Carlo simulations of binary-search guess counts.

Run the default simulation via:
    python -m simulations.run

Compare two presets via:
    python -m simulations.compare --preset-a small --preset-b large
"""
