# this is a package
