"""Receipt scoring and submission services."""
