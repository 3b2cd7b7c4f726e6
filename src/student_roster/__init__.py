"""Student Roster package.

Organized by feature modules (students, roster, storage) with a thin Flask
controller layer over service/repository layers.
"""
