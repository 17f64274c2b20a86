"""Device usage analysis: cleaning, partitioning and classifier comparison."""
