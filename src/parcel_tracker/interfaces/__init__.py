"""Ports (framework-free ABCs) the tracker's adapters implement."""
