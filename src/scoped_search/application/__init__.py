"""Application layer – pagination contract and search composition."""
