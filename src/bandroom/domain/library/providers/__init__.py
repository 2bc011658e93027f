"""External music catalogs that songs can be imported from."""
