"""HTTP surface for the Tetra Master fight rules."""
