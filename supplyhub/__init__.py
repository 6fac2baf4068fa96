"""SupplyHub B2B marketplace core: mock data access, cart and catalog."""
