"""EcoMap: scoring of sustainability interventions placed on a map."""

__version__ = "0.1.0"
