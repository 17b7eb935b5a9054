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

"""Message classes for the network resource provider, version v1.

Load balancers and their child resources, as exchanged with the management
API under Microsoft.Network.
"""

from __future__ import absolute_import

from apitools.base.protorpclite import messages as _messages
from apitools.base.py import encoding


package = 'network'

API_VERSION = '2015-05-01-preview'


class SubResource(_messages.Message):
  r"""A reference to another resource.

  Fields:
    id: Resource Id.
  """

  id = _messages.StringField(1)


class BackendAddressPoolPropertiesFormat(_messages.Message):
  r"""Properties of a backend address pool.

  Fields:
    backendIPConfigurations: The IP configurations of the members of the pool.
    loadBalancingRules: The load balancing rules that use this pool.
    provisioningState: The provisioning state of the resource.
  """

  backendIPConfigurations = _messages.MessageField('SubResource', 1, repeated=True)
  loadBalancingRules = _messages.MessageField('SubResource', 2, repeated=True)
  provisioningState = _messages.StringField(3)


class BackendAddressPool(_messages.Message):
  r"""A pool of backend IP addresses.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    name: The name of the resource, unique within the load balancer.
    properties: The properties of the pool.
  """

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('BackendAddressPoolPropertiesFormat', 4)


class FrontendIPConfigurationPropertiesFormat(_messages.Message):
  r"""Properties of a frontend IP configuration.

  Fields:
    inboundNatRules: The inbound NAT rules that use this configuration.
    loadBalancingRules: The load balancing rules that use this configuration.
    privateIPAddress: The private IP address of the configuration.
    privateIPAllocationMethod: The allocation method, Static or Dynamic.
    provisioningState: The provisioning state of the resource.
    publicIPAddress: The public IP address resource.
    subnet: The subnet resource.
  """

  inboundNatRules = _messages.MessageField('SubResource', 1, repeated=True)
  loadBalancingRules = _messages.MessageField('SubResource', 2, repeated=True)
  privateIPAddress = _messages.StringField(3)
  privateIPAllocationMethod = _messages.StringField(4)
  provisioningState = _messages.StringField(5)
  publicIPAddress = _messages.MessageField('SubResource', 6)
  subnet = _messages.MessageField('SubResource', 7)


class FrontendIPConfiguration(_messages.Message):
  r"""A frontend IP address of a load balancer.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    name: The name of the resource, unique within the load balancer.
    properties: The properties of the configuration.
  """

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('FrontendIPConfigurationPropertiesFormat', 4)


class InboundNatRulePropertiesFormat(_messages.Message):
  r"""Properties of an inbound NAT rule.

  Fields:
    backendIPConfiguration: The IP configuration traffic is forwarded to.
    backendPort: The port used for the internal endpoint.
    enableFloatingIP: Whether floating IP is enabled.
    frontendIPConfiguration: The frontend IP configuration the rule applies
      to.
    frontendPort: The port for the external endpoint.
    idleTimeoutInMinutes: The timeout for idle TCP connections.
    protocol: The transport protocol, Tcp or Udp.
    provisioningState: The provisioning state of the resource.
  """

  backendIPConfiguration = _messages.MessageField('SubResource', 1)
  backendPort = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  enableFloatingIP = _messages.BooleanField(3)
  frontendIPConfiguration = _messages.MessageField('SubResource', 4)
  frontendPort = _messages.IntegerField(5, variant=_messages.Variant.INT32)
  idleTimeoutInMinutes = _messages.IntegerField(6, variant=_messages.Variant.INT32)
  protocol = _messages.StringField(7)
  provisioningState = _messages.StringField(8)


class InboundNatRule(_messages.Message):
  r"""An inbound NAT rule of a load balancer.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    name: The name of the resource, unique within the load balancer.
    properties: The properties of the rule.
  """

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('InboundNatRulePropertiesFormat', 4)


class LoadBalancingRulePropertiesFormat(_messages.Message):
  r"""Properties of a load balancing rule.

  Fields:
    backendAddressPool: The pool traffic is balanced across.
    backendPort: The port used for internal connections.
    enableFloatingIP: Whether floating IP is enabled.
    frontendIPConfiguration: The frontend IP configuration the rule applies
      to.
    frontendPort: The port for the external endpoint.
    idleTimeoutInMinutes: The timeout for idle TCP connections.
    loadDistribution: The load distribution policy.
    probe: The probe used by the rule.
    protocol: The transport protocol, Tcp or Udp.
    provisioningState: The provisioning state of the resource.
  """

  backendAddressPool = _messages.MessageField('SubResource', 1)
  backendPort = _messages.IntegerField(2, variant=_messages.Variant.INT32)
  enableFloatingIP = _messages.BooleanField(3)
  frontendIPConfiguration = _messages.MessageField('SubResource', 4)
  frontendPort = _messages.IntegerField(5, variant=_messages.Variant.INT32)
  idleTimeoutInMinutes = _messages.IntegerField(6, variant=_messages.Variant.INT32)
  loadDistribution = _messages.StringField(7)
  probe = _messages.MessageField('SubResource', 8)
  protocol = _messages.StringField(9)
  provisioningState = _messages.StringField(10)


class LoadBalancingRule(_messages.Message):
  r"""A load balancing rule of a load balancer.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    name: The name of the resource, unique within the load balancer.
    properties: The properties of the rule.
  """

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('LoadBalancingRulePropertiesFormat', 4)


class ProbePropertiesFormat(_messages.Message):
  r"""Properties of a health probe.

  Fields:
    intervalInSeconds: The interval between probes.
    loadBalancingRules: The load balancing rules that use this probe.
    numberOfProbes: The number of failed probes before an endpoint is taken
      out of rotation.
    port: The port probed.
    protocol: The probe protocol, Http or Tcp.
    provisioningState: The provisioning state of the resource.
    requestPath: The URI probed when the protocol is Http.
  """

  intervalInSeconds = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  loadBalancingRules = _messages.MessageField('SubResource', 2, repeated=True)
  numberOfProbes = _messages.IntegerField(3, variant=_messages.Variant.INT32)
  port = _messages.IntegerField(4, variant=_messages.Variant.INT32)
  protocol = _messages.StringField(5)
  provisioningState = _messages.StringField(6)
  requestPath = _messages.StringField(7)


class Probe(_messages.Message):
  r"""A health probe of a load balancer.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    name: The name of the resource, unique within the load balancer.
    properties: The properties of the probe.
  """

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  name = _messages.StringField(3)
  properties = _messages.MessageField('ProbePropertiesFormat', 4)


class LoadBalancerPropertiesFormat(_messages.Message):
  r"""Properties of a load balancer.

  Fields:
    backendAddressPools: The backend address pools.
    frontendIPConfigurations: The frontend IP configurations.
    inboundNatRules: The inbound NAT rules.
    loadBalancingRules: The load balancing rules.
    probes: The health probes.
    provisioningState: The provisioning state of the resource.
    resourceGuid: The resource GUID property of the load balancer.
  """

  backendAddressPools = _messages.MessageField('BackendAddressPool', 1, repeated=True)
  frontendIPConfigurations = _messages.MessageField('FrontendIPConfiguration', 2, repeated=True)
  inboundNatRules = _messages.MessageField('InboundNatRule', 3, repeated=True)
  loadBalancingRules = _messages.MessageField('LoadBalancingRule', 4, repeated=True)
  probes = _messages.MessageField('Probe', 5, repeated=True)
  provisioningState = _messages.StringField(6)
  resourceGuid = _messages.StringField(7)


class LoadBalancer(_messages.Message):
  r"""A load balancer resource.

  Messages:
    TagsValue: Resource tags.

  Fields:
    etag: A unique read-only string that changes whenever the resource is
      updated.
    id: Resource Id.
    location: Resource location.
    name: Resource name.
    properties: The properties of the load balancer.
    tags: Resource tags.
    type: Resource type.
  """

  @encoding.MapUnrecognizedFields('additionalProperties')
  class TagsValue(_messages.Message):
    r"""Resource tags.

    Messages:
      AdditionalProperty: An additional property for a TagsValue object.

    Fields:
      additionalProperties: Additional properties of type TagsValue
    """

    class AdditionalProperty(_messages.Message):
      r"""An additional property for a TagsValue object.

      Fields:
        key: Name of the additional property.
        value: A string attribute.
      """

      key = _messages.StringField(1)
      value = _messages.StringField(2)

    additionalProperties = _messages.MessageField('AdditionalProperty', 1, repeated=True)

  etag = _messages.StringField(1)
  id = _messages.StringField(2)
  location = _messages.StringField(3)
  name = _messages.StringField(4)
  properties = _messages.MessageField('LoadBalancerPropertiesFormat', 5)
  tags = _messages.MessageField('TagsValue', 6)
  type = _messages.StringField(7)


class LoadBalancerListResult(_messages.Message):
  r"""Response for a list load balancers call.

  Fields:
    nextLink: The URL to get the next page of results.
    value: The load balancers in this page.
  """

  nextLink = _messages.StringField(1)
  value = _messages.MessageField('LoadBalancer', 2, repeated=True)


class NetworkLoadBalancersCreateOrUpdateRequest(_messages.Message):
  r"""A NetworkLoadBalancersCreateOrUpdateRequest object.

  Fields:
    apiVersion: The management API version.
    loadBalancer: A LoadBalancer resource to be passed as the request body.
    loadBalancerName: The name of the load balancer.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  loadBalancer = _messages.MessageField('LoadBalancer', 2)
  loadBalancerName = _messages.StringField(3, required=True)
  resourceGroupName = _messages.StringField(4, required=True)
  subscriptionId = _messages.StringField(5, required=True)


class NetworkLoadBalancersDeleteRequest(_messages.Message):
  r"""A NetworkLoadBalancersDeleteRequest object.

  Fields:
    apiVersion: The management API version.
    loadBalancerName: The name of the load balancer.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  loadBalancerName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class NetworkLoadBalancersDeleteResponse(_messages.Message):
  r"""An empty NetworkLoadBalancersDelete response."""


class NetworkLoadBalancersGetRequest(_messages.Message):
  r"""A NetworkLoadBalancersGetRequest object.

  Fields:
    apiVersion: The management API version.
    loadBalancerName: The name of the load balancer.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  loadBalancerName = _messages.StringField(2, required=True)
  resourceGroupName = _messages.StringField(3, required=True)
  subscriptionId = _messages.StringField(4, required=True)


class NetworkLoadBalancersListRequest(_messages.Message):
  r"""A NetworkLoadBalancersListRequest object.

  Fields:
    apiVersion: The management API version.
    resourceGroupName: The name of the resource group.
    subscriptionId: The subscription that owns the resource group.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  resourceGroupName = _messages.StringField(2, required=True)
  subscriptionId = _messages.StringField(3, required=True)


class NetworkLoadBalancersListAllRequest(_messages.Message):
  r"""A NetworkLoadBalancersListAllRequest object.

  Fields:
    apiVersion: The management API version.
    subscriptionId: The subscription to list load balancers in.
  """

  apiVersion = _messages.StringField(1, default=API_VERSION)
  subscriptionId = _messages.StringField(2, required=True)


class StandardQueryParameters(_messages.Message):
  r"""Query parameters accepted by all methods.

  Fields:
    prettyPrint: Returns response with indentations and line breaks.
  """

  prettyPrint = _messages.BooleanField(1, default=True)


for _request in (NetworkLoadBalancersCreateOrUpdateRequest,
                 NetworkLoadBalancersDeleteRequest,
                 NetworkLoadBalancersGetRequest,
                 NetworkLoadBalancersListRequest,
                 NetworkLoadBalancersListAllRequest):
  encoding.AddCustomJsonFieldMapping(_request, 'apiVersion', 'api-version')
