"""
tonelli: square roots modulo an odd prime using the Tonelli-Shanks algorithm
"""
# tonelli/__init__.py
from tonelli.arithmetic import *
from tonelli.core.exceptions import *
from tonelli.residues import *
from tonelli.sqrt import *
