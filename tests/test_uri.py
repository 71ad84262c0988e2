from unittest import TestCase

from potion.exceptions import MissingParameterError
from potion.uri import expand, variables, required_variables


class UriTemplateTestCase(TestCase):

    def test_simple_expansion(self):
        self.assertEqual('/orgs/github', expand('/orgs/{org}', {'org': 'github'}))
        self.assertEqual('/teams/100000', expand('/teams/{team_id}', {'team_id': 100000}))
        self.assertEqual('/repos/github/developer.github.com',
                         expand('/repos/{owner}/{repo}', {'owner': 'github', 'repo': 'developer.github.com'}))

    def test_extra_params_ignored(self):
        params = {'org': 'github', 'type': 'private'}
        self.assertEqual('/orgs/github', expand('/orgs/{org}', params))
        self.assertEqual({'org': 'github', 'type': 'private'}, params)

    def test_percent_encoding(self):
        self.assertEqual('/users/a%20b%2Fc', expand('/users/{user}', {'user': 'a b/c'}))
        self.assertEqual('/files/a/b%20c', expand('/files/{+path}', {'path': 'a/b c'}))

    def test_scalar_values(self):
        self.assertEqual('/flags/true', expand('/flags/{flag}', {'flag': True}))
        self.assertEqual('/list/a,b', expand('/list/{items}', {'items': ['a', 'b']}))

    def test_missing_parameter(self):
        with self.assertRaises(MissingParameterError) as cx:
            expand('/orgs/{org}/teams/{team}', {'org': 'github'})

        self.assertEqual('team', cx.exception.name)
        self.assertEqual('/orgs/{org}/teams/{team}', cx.exception.template)

    def test_none_is_missing(self):
        with self.assertRaises(MissingParameterError):
            expand('/orgs/{org}', {'org': None})

    def test_optional_path_segments(self):
        template = 'http://api.test/teams/1/members{/member}'
        self.assertEqual('http://api.test/teams/1/members', expand(template, {}))
        self.assertEqual('http://api.test/teams/1/members/octocat', expand(template, {'member': 'octocat'}))

        template = 'http://api.test/teams/1/repos{/owner}{/repo}'
        self.assertEqual('http://api.test/teams/1/repos/github/linguist',
                         expand(template, {'owner': 'github', 'repo': 'linguist'}))

    def test_query_expansion(self):
        self.assertEqual('/search?q=potion&page=2', expand('/search{?q,page,per_page}', {'q': 'potion', 'page': 2}))
        self.assertEqual('/search', expand('/search{?q}', {}))
        self.assertEqual('/search?q=a&page=1', expand('/search?q=a{&page}', {'page': 1}))

    def test_other_operators(self):
        self.assertEqual('/file.json', expand('/file{.format}', {'format': 'json'}))
        self.assertEqual('/map;x=1;y=2', expand('/map{;x,y}', {'x': 1, 'y': 2}))
        self.assertEqual('/page#a/b', expand('/page{#section}', {'section': 'a/b'}))

    def test_deterministic(self):
        template = '/repos/{owner}/{repo}/issues{/number}{?state}'
        params = {'owner': 'github', 'repo': 'linguist', 'state': 'open'}
        self.assertEqual(expand(template, params), expand(template, params))
        self.assertNotIn('{', expand(template, params))

    def test_variables(self):
        template = '/repos/{owner}/{repo}/issues{/number}{?state,labels}'
        self.assertEqual(['owner', 'repo', 'number', 'state', 'labels'], variables(template))
        self.assertEqual(['owner', 'repo'], required_variables(template))
        self.assertEqual([], variables('/user'))

    def test_modifiers(self):
        self.assertEqual('/x/val', expand('/x/{var:3}', {'var': 'value'}))
        self.assertEqual('/x?list=a&list=b', expand('/x{?list*}', {'list': ['a', 'b']}))
        self.assertEqual('/x/a/b', expand('/x{/list*}', {'list': ['a', 'b']}))
        self.assertEqual(['var'], variables('/x/{var:3}'))
        self.assertEqual(['list'], variables('/x{?list*}'))
        self.assertEqual(['var'], required_variables('/x/{var:3}{?list*}'))

    def test_prefix_of_missing_variable(self):
        with self.assertRaises(MissingParameterError) as cx:
            expand('/x/{var:3}', {})

        self.assertEqual('var', cx.exception.name)
