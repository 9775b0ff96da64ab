"""`ParcelStore` behaviour shared by every backend."""
