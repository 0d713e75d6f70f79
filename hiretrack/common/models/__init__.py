from .abstract import TimeStampedModel, SlugModel, MetadataModel
