from .money import Money as Money
