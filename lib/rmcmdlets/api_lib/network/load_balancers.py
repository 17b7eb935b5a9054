# -*- coding: utf-8 -*- #
# Copyright 2026 The rmcmdlets Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Utilities for the load balancers service of the network API."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from apitools.base.py import encoding
from apitools.base.py import exceptions as apitools_exceptions
from rmcmdlets.api_lib.util import apis
from rmcmdlets.api_lib.util import paging
from rmcmdlets.core import properties

from six.moves import http_client as httplib


API_NAME = 'network'
API_VERSION = 'v1'

LOAD_BALANCER_PATH = (
    '/subscriptions/{subscription}/resourceGroups/{resource_group}/providers/'
    'Microsoft.Network/loadBalancers/{name}')

FRONTEND_IP_CONFIGURATIONS = 'frontendIPConfigurations'
BACKEND_ADDRESS_POOLS = 'backendAddressPools'
PROBES = 'probes'
INBOUND_NAT_RULES = 'inboundNatRules'
LOAD_BALANCING_RULES = 'loadBalancingRules'

# Child collections, in the order they are put on the request.
CHILD_COLLECTIONS = (
    FRONTEND_IP_CONFIGURATIONS,
    BACKEND_ADDRESS_POOLS,
    PROBES,
    INBOUND_NAT_RULES,
    LOAD_BALANCING_RULES,
)

# Reference fields of each child kind and the collection they point into.
_CHILD_REFERENCES = {
    INBOUND_NAT_RULES: (
        ('frontendIPConfiguration', FRONTEND_IP_CONFIGURATIONS),),
    LOAD_BALANCING_RULES: (
        ('frontendIPConfiguration', FRONTEND_IP_CONFIGURATIONS),
        ('backendAddressPool', BACKEND_ADDRESS_POOLS),
        ('probe', PROBES)),
}


def GetClientInstance(http_client=None):
  return apis.GetClientInstance(API_NAME, API_VERSION, http_client=http_client)


def GetMessagesModule(client=None):
  client = client or GetClientInstance()
  return client.MESSAGES_MODULE


def LoadBalancerPath(subscription, resource_group, name):
  """Returns the full resource path of a load balancer."""
  return LOAD_BALANCER_PATH.format(
      subscription=subscription, resource_group=resource_group, name=name)


def ChildResourcePath(subscription, resource_group, load_balancer_name,
                      collection, child_name):
  """Returns the full resource path of a load balancer child resource."""
  return '{0}/{1}/{2}'.format(
      LoadBalancerPath(subscription, resource_group, load_balancer_name),
      collection, child_name)


def BuildLoadBalancer(messages, name, location,
                      frontend_ip_configurations=None,
                      backend_address_pools=None,
                      probes=None,
                      inbound_nat_rules=None,
                      load_balancing_rules=None,
                      tags=None):
  """Builds the LoadBalancer message sent to CreateOrUpdate.

  A child collection is put on the request only when it has at least one
  element. None (never supplied) and [] (explicitly empty) both leave the
  field unset so it is omitted from the serialized request.

  Args:
    messages: The network API messages module.
    name: str, The load balancer name.
    location: str, The region of the load balancer.
    frontend_ip_configurations: [FrontendIPConfiguration] or None.
    backend_address_pools: [BackendAddressPool] or None.
    probes: [Probe] or None.
    inbound_nat_rules: [InboundNatRule] or None.
    load_balancing_rules: [LoadBalancingRule] or None.
    tags: {str: str}, Resource tags or None.

  Returns:
    messages.LoadBalancer, The request body.
  """
  lb_properties = messages.LoadBalancerPropertiesFormat()
  supplied = {
      FRONTEND_IP_CONFIGURATIONS: frontend_ip_configurations,
      BACKEND_ADDRESS_POOLS: backend_address_pools,
      PROBES: probes,
      INBOUND_NAT_RULES: inbound_nat_rules,
      LOAD_BALANCING_RULES: load_balancing_rules,
  }
  for collection in CHILD_COLLECTIONS:
    children = supplied[collection]
    if children:
      setattr(lb_properties, collection, list(children))

  load_balancer = messages.LoadBalancer(
      name=name, location=location, properties=lb_properties)
  if tags:
    load_balancer.tags = encoding.DictToAdditionalPropertyMessage(
        tags, messages.LoadBalancer.TagsValue, sort_items=True)
  return load_balancer


def _ExpandReference(reference, subscription, resource_group,
                     load_balancer_name, collection):
  """Expands a bare-name SubResource reference into a full resource path."""
  if reference is None or not reference.id or reference.id.startswith('/'):
    return
  reference.id = ChildResourcePath(subscription, resource_group,
                                   load_balancer_name, collection,
                                   reference.id)


def NormalizeChildResourceIds(load_balancer, subscription, resource_group):
  """Rewrites the ids of the load balancer's children to full resource paths.

  Every named child gets the id of its own resource path. References between
  children (a rule's frontend IP configuration, backend pool or probe) may be
  given as a bare child name and are expanded the same way. References that
  are already full paths are left alone.

  Args:
    load_balancer: messages.LoadBalancer, Modified in place.
    subscription: str, The subscription id.
    resource_group: str, The resource group name.
  """
  lb_properties = load_balancer.properties
  if lb_properties is None:
    return
  for collection in CHILD_COLLECTIONS:
    for child in getattr(lb_properties, collection):
      if child.name:
        child.id = ChildResourcePath(subscription, resource_group,
                                     load_balancer.name, collection,
                                     child.name)
      if child.properties is None:
        continue
      for field, target in _CHILD_REFERENCES.get(collection, ()):
        _ExpandReference(getattr(child.properties, field), subscription,
                         resource_group, load_balancer.name, target)


def _IsStatus(error, status):
  return getattr(error, 'status_code', None) == status


class LoadBalancersClient(object):
  """Client for the load balancers service in the network API."""

  def __init__(self, client=None, messages=None, subscription=None):
    self.client = client or GetClientInstance()
    self.messages = messages or self.client.MESSAGES_MODULE
    self._service = self.client.loadBalancers
    self._subscription = subscription

  @property
  def subscription(self):
    return (self._subscription or
            properties.VALUES.core.subscription.Get(required=True))

  def Get(self, resource_group, name):
    request = self.messages.NetworkLoadBalancersGetRequest(
        loadBalancerName=name,
        resourceGroupName=resource_group,
        subscriptionId=self.subscription)
    return self._service.Get(request)

  def Exists(self, resource_group, name):
    """Returns True if the load balancer exists, False on a 404.

    Args:
      resource_group: str, The resource group name.
      name: str, The load balancer name.

    Raises:
      apitools_exceptions.HttpError: The lookup failed with anything but 404.

    Returns:
      bool, Whether the load balancer exists.
    """
    try:
      self.Get(resource_group, name)
    except apitools_exceptions.HttpError as e:
      if _IsStatus(e, httplib.NOT_FOUND):
        return False
      raise
    return True

  def CreateOrUpdate(self, resource_group, name, load_balancer):
    request = self.messages.NetworkLoadBalancersCreateOrUpdateRequest(
        loadBalancer=load_balancer,
        loadBalancerName=name,
        resourceGroupName=resource_group,
        subscriptionId=self.subscription)
    return self._service.CreateOrUpdate(request)

  def Delete(self, resource_group, name):
    """Deletes a load balancer.

    The API answers 202 Accepted while the deletion completes in the
    background, which apitools reports as an error.

    Args:
      resource_group: str, The resource group name.
      name: str, The load balancer name.

    Returns:
      The delete response, or None when the deletion was accepted.
    """
    request = self.messages.NetworkLoadBalancersDeleteRequest(
        loadBalancerName=name,
        resourceGroupName=resource_group,
        subscriptionId=self.subscription)
    try:
      return self._service.Delete(request)
    except apitools_exceptions.HttpError as e:
      if _IsStatus(e, httplib.ACCEPTED):
        return None
      raise

  def List(self, resource_group=None, limit=None):
    """Lists load balancers in a resource group, or in the subscription.

    Args:
      resource_group: str, The resource group, None for all of them.
      limit: int, The maximum number of load balancers to return.

    Returns:
      A generator of LoadBalancer messages.
    """
    if resource_group:
      request = self.messages.NetworkLoadBalancersListRequest(
          resourceGroupName=resource_group,
          subscriptionId=self.subscription)
      return paging.YieldFromNextLink(self._service, 'List', request,
                                      limit=limit)
    request = self.messages.NetworkLoadBalancersListAllRequest(
        subscriptionId=self.subscription)
    return paging.YieldFromNextLink(self._service, 'ListAll', request,
                                    limit=limit)


def ChildResourcesFromDicts(messages, collection, values):
  """Converts parsed file content into child resource messages.

  Args:
    messages: The network API messages module.
    collection: str, One of CHILD_COLLECTIONS.
    values: list, The parsed YAML/JSON objects, or None.

  Returns:
    A list of child messages, or None when values is None.
  """
  if values is None:
    return None
  message_type = {
      FRONTEND_IP_CONFIGURATIONS: messages.FrontendIPConfiguration,
      BACKEND_ADDRESS_POOLS: messages.BackendAddressPool,
      PROBES: messages.Probe,
      INBOUND_NAT_RULES: messages.InboundNatRule,
      LOAD_BALANCING_RULES: messages.LoadBalancingRule,
  }[collection]
  return [encoding.PyValueToMessage(message_type, value) for value in values]
