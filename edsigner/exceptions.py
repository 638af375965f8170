class Ed25519Error(ValueError):
  """Invalid input to an Ed25519 operation"""

class InvalidKeyFormat(Ed25519Error):
  """Key or point encoding does not have the expected 32-byte shape"""

class InvalidPoint(Ed25519Error):
  """Decoded coordinates are not on the Ed25519 curve"""

class InvalidArgument(Ed25519Error):
  """Unsupported mode or configuration value"""
