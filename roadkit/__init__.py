"""Road geometry toolkit: Fresnel integrals, clothoid spirals, polylines, ground points and OSM elements."""

__version__ = "0.1.0"