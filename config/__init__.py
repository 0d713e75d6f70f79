# Format :: (major, minor, patch, build, 'released')
VERSION = (1, 0, 0, 0, 'released')
