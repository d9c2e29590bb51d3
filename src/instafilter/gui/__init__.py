"""Qt front-end for Instafilter."""
