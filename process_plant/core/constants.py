"""
Model constants.
"""

# Stream naming: "s" + sequence number
STREAM_NAME_PREFIX: str = "s"

# Fixed port counts
MIXER_OUTPUTS: int = 1
REACTOR_INPUTS: int = 1
REACTOR_SINGLE_OUTPUTS: int = 1
REACTOR_DOUBLE_OUTPUTS: int = 2

# Absolute tolerance for mass balance checks (kg/h)
MASS_BALANCE_TOLERANCE: float = 0.01
