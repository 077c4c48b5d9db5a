"""Analysis core: models, ports and the three pipeline stages."""
