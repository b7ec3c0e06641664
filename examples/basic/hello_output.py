"""Build and print one OUTPUT line — zero config, zero deps."""

from hellman import HellmanOutput

out = HellmanOutput.from_text("Fresh Avacado").push_numeric(13).push_numeric(1.1)
print(out)
