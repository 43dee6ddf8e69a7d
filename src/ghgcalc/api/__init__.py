"""HTTP surface for the calculators."""
