"""Flask UI and command line front ends for the anagrams engine."""
