"""Holiday Hopper: explore any destination through Street View."""
