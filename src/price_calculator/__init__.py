"""
Product Price Calculator Package

Converts bulk purchase cost data (cost per box/ctn/pck and quantity per box)
into unit and box selling prices, profit percentages and margins.
"""

__version__ = "1.0.0"
