"""
The MODEL layer contains pure data structures and the curve formulas.
It has NO knowledge of plotting (matplotlib) or of the console demo.
"""
