"""Parse → walk → normalize pipeline and the file intake in front of it."""
