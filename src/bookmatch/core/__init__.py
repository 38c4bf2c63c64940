# ABOUTME: Application flows around the engine.
# ABOUTME: Loads library and search-result records and makes the auto-add decision.
