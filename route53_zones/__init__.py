"""Route 53 hosted zones, delegation roles and DNSSEC as CDK constructs."""
