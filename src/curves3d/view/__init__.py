"""
The VIEW layer draws curves with matplotlib. It only reads from the model.
"""
