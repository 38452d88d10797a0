"""
Farm Manager - a Reflex app for tracking crops from planting to harvest.
"""
