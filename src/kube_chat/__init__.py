"""kube-chat -- terminal AI assistant for Kubernetes clusters."""

__version__ = '0.1.0'
