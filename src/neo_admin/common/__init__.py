"""Common infrastructure shared by the admin features."""
