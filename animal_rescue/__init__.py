"""Animal Rescue adoption backend."""
