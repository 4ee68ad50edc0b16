"""Rules tables and calculators: advancement, spell slots and armor class."""
