# cli package
