"""
Shared pytest configuration: render figures off-screen.
"""

import matplotlib

matplotlib.use('Agg')
