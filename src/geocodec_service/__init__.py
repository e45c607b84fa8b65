"""HTTP service exposing the geocodec WKT and Route JSON codecs."""
