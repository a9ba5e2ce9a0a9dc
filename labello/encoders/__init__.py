# Import all encoders so they register with the registry
from labello.encoders.ordinal import OrdinalEncoder  # noqa: F401
from labello.encoders.onehot import OneHotEncoder  # noqa: F401
from labello.encoders.custom import CustomEncoder  # noqa: F401
