class UsersMixin(object):

    def user(self, username=None, **options):
        """
        Get a single user, or the authenticated user if no ``username`` is given.

        :param str username: login of the user
        :return: a :class:`potion.resource.Resource` representing the user
        """
        if username is None:
            return self.root.rels['current_user'].get(options).data
        return self.root.rels['user'].get(options, {'uri': {'user': username}}).data
