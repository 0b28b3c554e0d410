"""Generic algorithms written against the algebra kernels' operation contract."""
