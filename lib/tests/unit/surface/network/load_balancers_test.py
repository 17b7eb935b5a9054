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

"""Tests for the network load-balancers commands."""

from __future__ import absolute_import
from __future__ import division
from __future__ import unicode_literals

from rmcmdlets.api_lib.util import exceptions as api_exceptions
from rmcmdlets.calliope import exceptions as calliope_exceptions
from rmcmdlets.core.diagnostics import check_base
from rmcmdlets.core.diagnostics import network_diagnostics
from tests.lib import cli_test_base

_LB_PATH = ('/subscriptions/{0}/resourceGroups/rg/providers/'
            'Microsoft.Network/loadBalancers/lb1'.format(
                cli_test_base.SUBSCRIPTION))

_FRONTENDS = """\
- name: fe1
  properties:
    privateIPAllocationMethod: Dynamic
"""

_RULES = """\
[{"name": "rule1",
  "properties": {"frontendIPConfiguration": {"id": "fe1"},
                 "frontendPort": 80, "backendPort": 8080,
                 "protocol": "Tcp"}}]
"""


class LoadBalancersTestBase(cli_test_base.ApiMockBase):

  API_NAME = 'network'

  def _GetRequest(self):
    return self.messages.NetworkLoadBalancersGetRequest(
        loadBalancerName='lb1', resourceGroupName='rg',
        subscriptionId=cli_test_base.SUBSCRIPTION)

  def ExpectGet(self, response=None, exception=None):
    self.client.loadBalancers.Get.Expect(
        self._GetRequest(), response=response, exception=exception)

  def ExpectCreate(self, load_balancer, response=None, exception=None):
    self.client.loadBalancers.CreateOrUpdate.Expect(
        self.messages.NetworkLoadBalancersCreateOrUpdateRequest(
            loadBalancer=load_balancer,
            loadBalancerName='lb1', resourceGroupName='rg',
            subscriptionId=cli_test_base.SUBSCRIPTION),
        response=response or load_balancer, exception=exception)

  def BareLoadBalancer(self):
    return self.messages.LoadBalancer(
        name='lb1', location='westus',
        properties=self.messages.LoadBalancerPropertiesFormat())

  def Created(self):
    return self.messages.LoadBalancer(
        id=_LB_PATH, name='lb1', location='westus',
        properties=self.messages.LoadBalancerPropertiesFormat(
            provisioningState='Succeeded'))


class CreateTest(LoadBalancersTestBase):

  def testCreateNew(self):
    self.ExpectGet(exception=cli_test_base.MakeHttpError(404))
    self.ExpectCreate(self.BareLoadBalancer())
    self.ExpectGet(response=self.Created())

    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus')

    self.assertEqual([], context.errors)
    self.assertEqual(0, context.exit_code)
    self.assertEqual([self.Created()], context.results)
    self.prompter.assert_not_called()
    self.AssertOutputContains('name: lb1')
    self.AssertOutputContains('provisioningState: Succeeded')
    self.AssertErrContains('Created load balancer [lb1].')

  def testChildResourcesFromFilesAreNormalized(self):
    frontends = self.Touch('frontends.yaml', _FRONTENDS)
    rules = self.Touch('rules.json', _RULES)
    m = self.messages
    expected = m.LoadBalancer(
        name='lb1', location='westus',
        properties=m.LoadBalancerPropertiesFormat(
            frontendIPConfigurations=[m.FrontendIPConfiguration(
                id=_LB_PATH + '/frontendIPConfigurations/fe1', name='fe1',
                properties=m.FrontendIPConfigurationPropertiesFormat(
                    privateIPAllocationMethod='Dynamic'))],
            loadBalancingRules=[m.LoadBalancingRule(
                id=_LB_PATH + '/loadBalancingRules/rule1', name='rule1',
                properties=m.LoadBalancingRulePropertiesFormat(
                    frontendIPConfiguration=m.SubResource(
                        id=_LB_PATH + '/frontendIPConfigurations/fe1'),
                    frontendPort=80, backendPort=8080, protocol='Tcp'))]),
        tags=m.LoadBalancer.TagsValue(additionalProperties=[
            m.LoadBalancer.TagsValue.AdditionalProperty(
                key='env', value='test')]))
    self.ExpectGet(exception=cli_test_base.MakeHttpError(404))
    self.ExpectCreate(expected)
    self.ExpectGet(response=self.Created())

    context = self.Run([
        'network', 'load-balancers', 'create', 'lb1',
        '--resource-group', 'rg', '--location', 'westus',
        '--frontend-ip-configurations-from-file', frontends,
        '--load-balancing-rules-from-file', rules,
        '--tags', 'env=test'])

    self.assertEqual([], context.errors)

  def testExistingDeclinedIsANoOp(self):
    self.ExpectGet(response=self.Created())
    self.WriteInput(False)

    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus')

    self.assertEqual(1, self.prompter.call_count)
    self.assertEqual([], context.results)
    self.assertEqual([], context.errors)
    self.assertEqual(0, context.exit_code)
    self.AssertOutputEquals('')

  def testExistingConfirmedIsOverwritten(self):
    self.ExpectGet(response=self.Created())
    self.ExpectCreate(self.BareLoadBalancer())
    self.ExpectGet(response=self.Created())

    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus')

    self.assertEqual(1, self.prompter.call_count)
    self.assertEqual([self.Created()], context.results)

  def testExistingWithForceDoesNotPrompt(self):
    self.ExpectGet(response=self.Created())
    self.ExpectCreate(self.BareLoadBalancer())
    self.ExpectGet(response=self.Created())

    self.Run('network load-balancers create lb1 --resource-group rg '
             '--location westus --force')

    self.prompter.assert_not_called()

  def testExistingWithQuietDoesNotPrompt(self):
    self.ExpectGet(response=self.Created())
    self.ExpectCreate(self.BareLoadBalancer())
    self.ExpectGet(response=self.Created())

    context = self.Run('--quiet network load-balancers create lb1 '
                       '--resource-group rg --location westus')

    self.prompter.assert_not_called()
    self.assertEqual(0, context.exit_code)

  def testCreateFailureIsNormalized(self):
    self.ExpectGet(exception=cli_test_base.MakeHttpError(404))
    self.ExpectCreate(
        self.BareLoadBalancer(),
        exception=cli_test_base.MakeHttpError(
            400, cli_test_base.MakeDetailedErrorBody(
                'InvalidResourceReference', 'Subnet not found')))

    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus')

    self.assertEqual(1, context.exit_code)
    self.assertEqual(1, len(context.errors))
    self.assertIsInstance(context.errors[0].exception,
                          api_exceptions.HttpException)
    self.AssertErrContains(
        '(rmcmdlets.network.load-balancers.create) '
        'InvalidResourceReference: Subnet not found')
    self.AssertOutputEquals('')

  def testUnreachableEndpointMakesNoRemoteCall(self):
    self.checker.Check.return_value = check_base.CheckResult(
        passed=False, message='Reachability Check failed.')

    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus')

    self.assertEqual(1, len(context.errors))
    self.assertIsInstance(context.errors[0].exception,
                          network_diagnostics.ConnectivityError)

  def testTooManyTagsMakesNoRemoteCall(self):
    tags = ','.join('k{0}=v'.format(i) for i in range(16))
    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus --tags ' + tags)
    self.assertIsInstance(context.errors[0].exception,
                          calliope_exceptions.InvalidArgumentException)

  def testChildFileMustHoldAList(self):
    path = self.Touch('probes.yaml', 'name: p1\n')
    context = self.Run(
        'network load-balancers create lb1 --resource-group rg '
        '--location westus --probes-from-file ' + path)
    self.assertIsInstance(context.errors[0].exception,
                          calliope_exceptions.BadFileException)
    self.AssertErrContains('[--probes-from-file] must hold a list of objects')


class DescribeTest(LoadBalancersTestBase):

  def testDescribe(self):
    self.ExpectGet(response=self.Created())
    self.Run('network load-balancers describe lb1 --resource-group rg '
             '--format json')
    self.AssertOutputContains('"name": "lb1"')

  def testDescribeNotFound(self):
    self.ExpectGet(exception=cli_test_base.MakeHttpError(
        404, cli_test_base.MakeDetailedErrorBody(
            'ResourceNotFound', 'lb1 was not found')))
    context = self.Run('network load-balancers describe lb1 '
                       '--resource-group rg')
    self.assertEqual(1, context.exit_code)
    self.AssertErrContains('ResourceNotFound: lb1 was not found')


class ListTest(LoadBalancersTestBase):

  def testListAll(self):
    self.client.loadBalancers.ListAll.Expect(
        self.messages.NetworkLoadBalancersListAllRequest(
            subscriptionId=cli_test_base.SUBSCRIPTION),
        response=self.messages.LoadBalancerListResult(value=[
            self.messages.LoadBalancer(name='lb1')]))
    context = self.Run('network load-balancers list --format json')
    self.assertEqual(1, len(context.results))
    self.AssertOutputEquals('[\n  {\n    "name": "lb1"\n  }\n]\n')

  def testListEmpty(self):
    self.client.loadBalancers.List.Expect(
        self.messages.NetworkLoadBalancersListRequest(
            resourceGroupName='rg',
            subscriptionId=cli_test_base.SUBSCRIPTION),
        response=self.messages.LoadBalancerListResult())
    self.Run('network load-balancers list --resource-group rg --format json')
    self.AssertOutputEquals('[]\n')


class DeleteTest(LoadBalancersTestBase):

  def _ExpectDelete(self):
    self.client.loadBalancers.Delete.Expect(
        self.messages.NetworkLoadBalancersDeleteRequest(
            loadBalancerName='lb1', resourceGroupName='rg',
            subscriptionId=cli_test_base.SUBSCRIPTION),
        exception=cli_test_base.MakeHttpError(202))

  def testDelete(self):
    self._ExpectDelete()
    context = self.Run('network load-balancers delete lb1 --resource-group rg')
    self.assertEqual(0, context.exit_code)
    self.assertEqual(1, self.prompter.call_count)
    self.AssertErrContains('Deleted load balancer [lb1].')

  def testDeleteDeclined(self):
    self.WriteInput(False)
    context = self.Run('network load-balancers delete lb1 --resource-group rg')
    self.assertEqual(0, context.exit_code)
    self.assertEqual([], context.errors)
    self.prompter.assert_called_once()
    self.AssertErrNotContains('Deleted load balancer')

  def testDeleteForce(self):
    self._ExpectDelete()
    self.Run('network load-balancers delete lb1 --resource-group rg --force')
    self.prompter.assert_not_called()
