"""Django project package for the restaurant floor backend."""
