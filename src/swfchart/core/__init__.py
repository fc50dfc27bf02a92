"""Core document model, typed settings and the chart builder."""
