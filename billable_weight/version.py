"""Calculator version, stamped onto batch output as calculator_version."""

VERSION = "1.0.0"
